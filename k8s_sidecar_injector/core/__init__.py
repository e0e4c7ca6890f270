"""
Core module for the Jaeger sidecar injector.

Contains the workload and Jaeger instance models, quantity parsing, manifest
conversion and the injection engine.
"""
