"""Adaptadores de I/O (lectura de documentos, exportación JSON)."""
