from ..config import Colours


def format_weather(report: dict) -> str:
    """One-line summary of a weather report."""
    return (
        f"{report['city']}: {report['temp']}°C, {report['description']} "
        f"| Humidity {report['humidity']}% | Wind {report['wind']} m/s"
    )


def colourize(text: str, colour: str) -> str:
    """Wrap text in an ANSI colour."""
    return f"{colour}{text}{Colours.RESET}"
