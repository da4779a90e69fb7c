"""ABP Helper -- scaffolds application services and AngularJS views for ABP solutions."""

__version__ = "0.1.0"
