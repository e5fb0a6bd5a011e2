"""Integration tests for the mobile page export.

These tests run the exporter end to end over real files: a YAML page dump
read by FileContentStore and an options file written by StatusEditor, both
in temporary directories. No WordPress site is needed.
"""
