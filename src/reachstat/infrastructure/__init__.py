"""Infrastructure layer — edge-list files and the NetworkX bridge."""
