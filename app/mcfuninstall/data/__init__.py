"""Bundled data files for mcf-uninstall."""
