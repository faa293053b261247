"""Core: dominio, codecs, servicios y configuración.

No depende de la CLI ni de los adaptadores de I/O.
"""
