"""Input devices"""
