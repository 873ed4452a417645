"""Infrastructure layer - adapters for git, HTTP services and files."""
