"""Core module of textseal: format tags, errors, codecs and password generation."""
