"""
Exceptions for textseal
Everything derives from TextSealError so callers have one general error catcher
"""


class TextSealError(Exception):
    # general container for errors
    pass


class InvalidKeyLength(TextSealError):
    # raised when a key resource holds fewer (or more, for ed25519) bytes than the scheme needs
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid key length: expected {expected} bytes, got {actual}")


class KeyParseError(TextSealError):
    # raised when the bytes do not form a valid key (e.g. bad curve point)
    pass


class SignatureFormatError(TextSealError):
    # raised when a signature has the wrong byte length, before verification
    pass


class EncodingError(TextSealError):
    # raised when base64 text cannot be decoded
    pass


class UnsupportedOperation(TextSealError):
    # raised when a format tag does not support the requested verb
    pass


class UnsupportedFormat(TextSealError, ValueError):
    # raised when a format string names no known tag
    pass


class EncryptError(TextSealError):
    # opaque, no detail from the primitive
    def __init__(self):
        super().__init__("Encrypt error")


class DecryptError(TextSealError):
    # opaque, no detail from the primitive
    def __init__(self):
        super().__init__("Decrypt error")


class PasswordPolicyError(TextSealError):
    # raised when the requested password length / classes cannot be satisfied
    pass
