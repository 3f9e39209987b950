"""Template engine, output files and the render pipeline."""
