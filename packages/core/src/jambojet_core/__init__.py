"""Shared exceptions and schemas for the JamboJet client."""
