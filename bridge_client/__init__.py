"""Bridge crypto/fiat quote client."""
