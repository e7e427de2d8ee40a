from .presentation import CardRendererPort
from .source import PersonProviderPort

__all__ = [
    "CardRendererPort",
    "PersonProviderPort",
]
