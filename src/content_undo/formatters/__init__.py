"""
Text helpers for presenting stored content to humans.

Truncation mirrors what the CMS backend shows in its listings: escaped
markup is cut at a fixed length, rich text is cut at word boundaries with
its tags kept balanced.
"""
