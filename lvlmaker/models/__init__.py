from lvlmaker.models.level import Level, Point, Wall

__all__ = ["Level", "Point", "Wall"]
