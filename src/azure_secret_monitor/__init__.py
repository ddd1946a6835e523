"""Azure Secret Monitor - reports Entra ID app secrets nearing expiry."""

__version__ = "1.0.0"
