"""gdgen: generate GDScript client bindings from Swagger descriptions."""

__version__ = "0.1.0"
