"""Front-ends that drive the menu (interactive console)."""
