"""Configuration, constants, security helpers and domain exceptions."""
