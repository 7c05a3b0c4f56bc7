from dataclasses import dataclass


@dataclass(frozen = True)
class Occurrence:
    """
    Container for a keyword occurrence in a single document.
    """
    document: str # Name of the document the keyword occurs in.
    frequency: int # Number of times the keyword occurs in that document.

    def __post_init__(self):
        if self.frequency < 1:
            raise ValueError(f'Occurrence frequency must be positive, got {self.frequency}')

    def __str__(self) -> str:
        return f'({self.document},{self.frequency})'
