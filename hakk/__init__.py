"""hakk -- quick and simplistic Akka project generator."""

__version__ = "0.1.0"
