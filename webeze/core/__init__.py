"""Core building blocks of the Webeze backend: persistence, I/O models, security and observability."""
