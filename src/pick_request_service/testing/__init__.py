"""Testing utilities – fakes for the service ports."""
