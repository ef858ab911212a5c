"""Core study logic: storage, datasets, sampling and study modes."""
