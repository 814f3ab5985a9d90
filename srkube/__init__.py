"""Spec models, port defaults, hashing, metadata merging and autoscaler building for StarRocks on Kubernetes."""

__version__ = "0.1.0"