"""Cliente de la API del conjunto residencial y controladores de sus pantallas."""

__version__ = "1.0.0"
