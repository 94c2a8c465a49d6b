"""Go vanity import redirector served with FastAPI."""
