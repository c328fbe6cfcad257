"""CLI command modules, loaded lazily by taskorder.cli.main"""
