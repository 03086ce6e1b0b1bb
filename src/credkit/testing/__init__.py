"""Testing – fakes and property-based strategies for credkit users."""
