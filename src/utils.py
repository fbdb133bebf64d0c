"""Utility functions for the application."""


def log(message: str, indent: int = 0, top: int = 0, bottom: int = 0) -> None:
    """
    Custom print function that supports indentation and padding.

    Args:
        message: The message to print.
        indent: Number of indentation units (2 spaces each).
        top: Number of empty lines to print before the message.
        bottom: Number of empty lines to print after the message.
    """
    if top > 0:
        print("\n" * (top - 1))

    output_message = f"{'  ' * indent}{message}"
    try:
        print(output_message)
    except UnicodeEncodeError:
        # Consoles without UTF-8 cannot print the emoji and Arabic text
        print(output_message.encode("ascii", errors="replace").decode("ascii"))

    if bottom > 0:
        print("\n" * (bottom - 1))


def slugify(title: str) -> str:
    """Turns a title typed by the user into the site's slug, e.g. 'one piece' -> 'one-piece'."""
    return "-".join(title.strip().lower().split())


def humanize_slug(slug: str) -> str:
    """Turns a slug back into a readable title, e.g. 'one-piece' -> 'one piece'."""
    return slug.replace("-", " ")
