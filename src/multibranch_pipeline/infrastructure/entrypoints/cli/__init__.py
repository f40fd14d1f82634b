from .cli_app import build_parser, main

__all__ = ["build_parser", "main"]
