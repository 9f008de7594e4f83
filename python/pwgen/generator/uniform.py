"""
Uniform ("secure") password generation.
"""

from ..entropy import EntropySource


class UniformGenerator:
    """Fill every position independently from one alphabet."""

    def __init__(self, entropy: EntropySource):
        self.entropy = entropy

    def generate(self, length: int, alphabet: bytes) -> bytearray:
        """
        Generate a password by sampling the alphabet once per position.

        Each position consumes one entropy byte and uses ``byte % len(alphabet)``
        as the index. When the alphabet size does not divide 256 the lower
        entries are slightly more likely, matching the output distribution of
        the classic pwgen.

        Args:
            length: Number of characters
            alphabet: Non-empty candidate characters

        Returns:
            The password bytes
        """
        if not alphabet:
            raise ValueError("Cannot sample from an empty alphabet")

        password = bytearray()
        for _ in range(length):
            idx = self.entropy.read_byte() % len(alphabet)
            password.append(alphabet[idx])

        return password
