"""Pydantic models shared by the Webeze backend."""
