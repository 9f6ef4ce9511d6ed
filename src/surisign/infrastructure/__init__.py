"""Infrastructure layer: native crypto bindings behind a readiness gate."""
