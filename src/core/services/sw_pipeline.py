"""Service-worker pipeline orchestration.

One linear run per invocation: obtain the content (webpack or raw read),
then hand it to the Output Router. The CLI is the only caller today, but
keeping the flow here leaves printing and progress out of the core and
makes the pipeline reusable from tests or other entry-points.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from adapters.raw_reader import read_entry
from core.domain.models import BundleResult, InvocationRequest, WriteOutcome
from core.interfaces.bundler import Bundler
from core.services.output_router import route


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress, warnings)."""

    step: Callable[[str], None] | None = None
    warning: Callable[[str], None] | None = None


@dataclass
class PipelineResult:
    """Output of a pipeline invocation."""

    request: InvocationRequest
    bundle: BundleResult
    outcome: WriteOutcome
    warnings: list[str] = field(default_factory=list)


def _resolve(path: Path, root: Path) -> Path:
    return path if path.is_absolute() else root / path


def produce_content(
    request: InvocationRequest,
    *,
    bundler: Bundler | None,
    root: Path,
) -> BundleResult:
    entry = _resolve(request.entry_file_path, root)
    if request.skip_compile:
        return BundleResult(content=read_entry(entry), stats=None)

    if bundler is None:
        raise ValueError("A bundler is required unless skip_compile is set.")
    return bundler.compile(
        entry,
        request.environment,
        env_file_path=_resolve(request.env_file_path, root),
        tsconfig_path=_resolve(request.tsconfig_path, root),
    )


def run(
    request: InvocationRequest,
    *,
    bundler: Bundler | None = None,
    hooks: PipelineHooks | None = None,
    root: Path | None = None,
) -> PipelineResult:
    hooks = hooks or PipelineHooks()
    root = root if root is not None else Path.cwd()
    warnings: list[str] = []

    if hooks.step:
        hooks.step("Reading entry file" if request.skip_compile else "Compiling with webpack")
    bundle = produce_content(request, bundler=bundler, root=root)

    if not bundle.content:
        message = f"{request.entry_file_path} produced empty output."
        warnings.append(message)
        if hooks.warning:
            hooks.warning(message)

    if hooks.step:
        hooks.step(f"Writing output ({request.mode.label()})")
    outcome = route(bundle.content, request.entry_file_path, request.mode, root=root)

    return PipelineResult(request=request, bundle=bundle, outcome=outcome, warnings=warnings)
