"""tlsbootstrap - RSA key, CSR and self-signed certificate generator."""

__version__ = "1.0.0"
