"""textseal: sign, verify, encrypt and decrypt text with interchangeable schemes."""

__version__ = "0.1.0"
