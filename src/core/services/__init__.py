"""Servicios del Core (enrutado de salida y pipeline)."""
