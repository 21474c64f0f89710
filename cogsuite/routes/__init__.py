"""HTTP blueprints for the menu and the three games."""
