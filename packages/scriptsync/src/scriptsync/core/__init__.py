"""Runtime primitives shared by command groups: context, filesystem, logging."""
