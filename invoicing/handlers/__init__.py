"""Event handlers wired onto the EventBus by the host application."""
