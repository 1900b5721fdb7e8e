"""Unit tests for individual components in isolation.

Coverage:
    - intake/: PDF filtering policies, file sizes, selection state
    - providers/: Configuration, remote two-stage calls, simulated answers
    - ui/state: Question form, result view, chat session

Uses stub providers and mock transports for external services.
"""
