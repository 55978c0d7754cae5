"""Audio side: periodic-wave export and the voice a sound sink consumes."""
