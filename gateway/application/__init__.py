"""Application layer: collaborator ports, resolver, feature gate and pipeline."""
