"""
Typed Slack API request and response models
"""
