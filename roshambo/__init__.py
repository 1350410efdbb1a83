"""
Round-robin rock-paper-scissors tournaments between pluggable strategies.
"""
