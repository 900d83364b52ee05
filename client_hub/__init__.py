"""Client Hub: clients, projects and tasks for a small business."""
