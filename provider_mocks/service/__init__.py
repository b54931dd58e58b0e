"""Use-cases behind the Fink and Pearl endpoints."""
