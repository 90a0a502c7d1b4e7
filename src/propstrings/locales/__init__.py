"""Locale bundles shipped with the package."""
