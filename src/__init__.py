"""
Review Insights
Batch pipelines for review sentiment and image analysis against a local inference server.
"""
