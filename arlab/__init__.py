"""ARLAB: backend del punto de venta del laboratorio clínico."""

__version__ = "1.0.0"
