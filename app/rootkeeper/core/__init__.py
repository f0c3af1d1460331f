"""Core infrastructure: paths, path syntax rules, settings and theming."""
