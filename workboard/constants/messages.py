# Application Messages
class AppMessages:
    TASK_CREATED = "Task created successfully"
    TASK_UPDATED = "Task updated successfully"
    TASK_DELETED = "Task deleted successfully"
    TASK_CLAIMED = "Task claimed successfully"
    TASK_UNCLAIMED = "Task released back to the open pool"
    MEMBER_CREATED = "Team member added successfully"
    MEMBER_UPDATED = "Team member updated successfully"
    MEMBER_DELETED = "Team member removed successfully"
    MEMBER_TERMINATED = "{0} has been terminated. {1} task(s) returned to the open pool."
    MEMBER_REACTIVATED = "{0} has been reactivated"
    GOAL_CREATED = "Goal created successfully"
    GOAL_UPDATED = "Goal updated successfully"
    GOAL_DELETED = "Goal deleted successfully"
    TODO_CREATED = "To-do created successfully"
    TODO_UPDATED = "To-do updated successfully"
    TODO_DELETED = "To-do deleted successfully"
    TODO_LIST_CREATED = "List created successfully"
    TODO_LIST_UPDATED = "List updated successfully"
    TODO_LIST_DELETED = "List deleted successfully"
    TODO_ITEM_CREATED = "Item added successfully"
    TODO_ITEM_UPDATED = "Item updated successfully"
    TODO_ITEM_DELETED = "Item deleted successfully"
    LOGIN_SUCCESS = "Signed in successfully"
    LOGOUT_SUCCESS = "Signed out successfully"
    OVERDUE_TASKS_MARKED = "Marked {0} task(s) as overdue"
    MEMBER_IDS_MIGRATED = "Re-keyed {0} team member document(s)"


# Notification titles
class NotificationTitles:
    SUCCESS = "Success"
    ERROR = "Error"
    MEMBER_TERMINATED = "Member Terminated"
    TERMINATION_FAILED = "Termination Failed"
    ACCESS_DENIED = "Access Denied"


# Repository error messages
class RepositoryErrors:
    TASK_CREATION_FAILED = "Failed to create task: {0}"
    TASK_UPDATE_FAILED = "Failed to update task: {0}"
    MEMBER_CREATION_FAILED = "Failed to create team member: {0}"
    MEMBER_TERMINATION_FAILED = "Failed to terminate team member: {0}"
    GOAL_CREATION_FAILED = "Failed to create goal: {0}"
    TODO_CREATION_FAILED = "Failed to create to-do: {0}"
    AUDIT_LOG_CREATION_FAILED = "Failed to write audit log: {0}"
    DB_INIT_FAILED = "Failed to initialize database: {0}"


# API error messages
class ApiErrors:
    REPOSITORY_ERROR = "Repository Error"
    SERVER_ERROR = "Server Error"
    UNEXPECTED_ERROR = "Unexpected Error"
    INTERNAL_SERVER_ERROR = "Internal server error"
    VALIDATION_ERROR = "Validation Error"
    RESOURCE_NOT_FOUND_TITLE = "Resource Not Found"
    STATE_CONFLICT_TITLE = "State Conflict"
    FORBIDDEN_TITLE = "Forbidden"
    AUTHENTICATION_FAILED = "Authentication Failed"
    TASK_NOT_FOUND = "Task with ID {0} not found."
    TASK_NOT_FOUND_GENERIC = "Task not found."
    MEMBER_NOT_FOUND = "Team member with ID {0} not found."
    MEMBER_NOT_FOUND_GENERIC = "Team member not found."
    GOAL_NOT_FOUND = "Goal with ID {0} not found."
    GOAL_NOT_FOUND_GENERIC = "Goal not found."
    TODO_NOT_FOUND = "To-do with ID {0} not found."
    TODO_LIST_NOT_FOUND = "List with ID {0} not found."
    TODO_ITEM_NOT_FOUND = "Item with ID {0} not found."
    NOTIFICATION_NOT_FOUND = "Notification with ID {0} not found."
    TASK_ALREADY_ASSIGNED = "Task is already assigned to another team member."
    TASK_ALREADY_COMPLETED = "Completed tasks cannot be claimed."
    TASK_NOT_ASSIGNED = "Task is not assigned to anyone."
    MEMBER_ALREADY_TERMINATED = "Team member is already terminated."
    MEMBER_ALREADY_ACTIVE = "Team member is already active."
    MEMBER_ALREADY_EXISTS = "A team member with ID {0} already exists."
    MEMBER_NOT_ACTIVE = "Team member {0} is not active."
    ADMIN_REQUIRED = "Only administrators can perform this action."
    SYSTEM_ACCOUNT_REQUIRED = "Access denied. Audit logs are only available to system accounts."
    UNCLAIM_NOT_ALLOWED = "Only the assignee or an administrator can release this task."
    TODO_LIST_ACCESS_DENIED = "You do not have access to this list."
    CANNOT_TERMINATE_SELF = "You cannot terminate your own account."


# Validation error messages
class ValidationErrors:
    BLANK_TITLE = "Title must not be blank."
    BLANK_NAME = "Name must not be blank."
    INVALID_OBJECT_ID = "{0} is not a valid ObjectId."
    INVALID_TASK_ID_FORMAT = "Please enter a valid Task ID format."
    INVALID_ID_FORMAT = "Please enter a valid ID format."
    INVALID_PROGRESS = "Progress must be between 0 and 100."
    TARGET_BEFORE_CREATED = "Target date must be after the created date."
    SHARED_LIST_REQUIRES_MEMBERS = "Shared lists must be shared with at least one team member."
    DUE_DATE_REQUIRED = "This list requires a due date for every item."
    INVALID_DATE_RANGE = "Start date must be before end date."
    NO_FIELDS_TO_UPDATE = "At least one field must be provided."
    INVALID_COLOR = "Color must be a hex value like #3b82f6."
    LIMIT_POSITIVE = "Limit must be a positive integer"
    MAX_LIMIT_EXCEEDED = "Maximum limit of {0} exceeded"


# Auth error messages
class AuthErrorMessages:
    TOKEN_MISSING = "Authentication token is required"
    TOKEN_EXPIRED = "Authentication token has expired"
    TOKEN_INVALID = "Invalid authentication token"
    REFRESH_TOKEN_EXPIRED = "Refresh token has expired, please sign in again"
    AUTHENTICATION_REQUIRED = "Authentication required"
    TOKEN_EXPIRED_TITLE = "Token Expired"
    INVALID_TOKEN_TITLE = "Invalid Token"
    PROFILE_NOT_FOUND = "No team profile found for this account. Please contact an administrator."
    ACCOUNT_TERMINATED = "This account has been terminated."
