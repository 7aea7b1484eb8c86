class Base32Error(ValueError):
    """
    Raised when a base32 secret cannot be decoded.
    """


class InvalidCharacter(Base32Error):
    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__('Invalid character in Base32 string "{}".'.format(character))


class InvalidPadding(Base32Error):
    def __init__(self) -> None:
        super().__init__("Base32 string had invalid padding or leftover bits.")
