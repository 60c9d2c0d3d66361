"""Adaptadores de infraestructura (webpack, sistema de ficheros)."""
