"""Token address validation utilities."""

MIN_ADDRESS_LENGTH = 32
MAX_ADDRESS_LENGTH = 44

# Base58 alphabet (no 0, O, I, l)
BASE58_ALPHABET = frozenset("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")


def is_valid_token_address(address: str) -> bool:
    """
    Validate a Solana token mint address.

    Mint addresses are base58-encoded 32-byte public keys, which gives
    32 to 44 characters drawn from the base58 alphabet.

    Args:
        address: The address to validate (should already be stripped)

    Returns:
        True if address format is valid, False otherwise
    """
    if not MIN_ADDRESS_LENGTH <= len(address) <= MAX_ADDRESS_LENGTH:
        return False
    return all(char in BASE58_ALPHABET for char in address)


def normalize_address(address: str) -> str:
    """
    Normalize a token address.

    Base58 is case-sensitive, so unlike ticker symbols the address is only
    stripped, never upper-cased.

    Args:
        address: The address to normalize

    Returns:
        Stripped address
    """
    return address.strip()
