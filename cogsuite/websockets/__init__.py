"""Socket.IO handlers for live game sessions."""
