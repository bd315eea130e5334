"""ZCV: build a structured career portfolio and turn it into LaTeX resumes."""

__version__ = "0.1.0"


def main() -> int:
    """Entry point for the application.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    from zcv.config import configure_logging
    from zcv.tui import main as tui_main

    configure_logging()
    tui_main()
    return 0
