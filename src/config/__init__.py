"""Bundled YAML configuration (config.yaml, includes, factory defaults)"""
