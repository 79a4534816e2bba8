"""Generator settings: YAML-backed defaults plus a validated model."""
