from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class NamedItem:
    """An item, which is identified by its name."""
    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("The name of an item may neither be None, nor empty")

    def __str__(self):
        return self.name
