"""
Configuration loading for the vanity import redirector.

This package is responsible for:
* Reading the YAML configuration file.
* Validating it into the immutable Config model.
"""
