"""Command line harnesses for the xorwow package."""
