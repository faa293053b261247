"""Servicios del Core (orquestación sobre los modelos del dominio)."""
