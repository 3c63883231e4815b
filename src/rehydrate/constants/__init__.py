"""Named constants shared across Rehydrate modules."""
