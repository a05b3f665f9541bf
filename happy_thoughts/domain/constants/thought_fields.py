"""Constants for Thought model field names"""


class ThoughtFields:
    """Field name constants for Thought model"""
    MESSAGE = "message"
    HEARTS = "hearts"
    CREATED_AT = "createdAt"
    USERNAME = "username"
    USER_ID = "userId"
    LIKED_BY = "likedBy"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
