"""Low-level helpers shared by the token writer and reader."""
