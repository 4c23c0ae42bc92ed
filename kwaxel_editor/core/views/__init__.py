"""
View components for the Kwaxel editor
"""
