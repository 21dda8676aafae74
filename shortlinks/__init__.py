"""Short link service: random slugs for long URLs, and redirects back."""

__version__ = "0.1.0"
