"""Access domain models: roles, menus, grants, and the trees built from them."""
