"""Option parsing, redirection and collectors for hostinfo."""
