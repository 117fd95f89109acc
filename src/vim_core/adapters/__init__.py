"""Host integrations for the editing core."""
