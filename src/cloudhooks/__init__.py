"""cloudhooks - command-line management of function webhooks."""

__version__ = "0.1.0"
