"""Core: dominio, configuración y servicios, sin dependencias de infraestructura."""
