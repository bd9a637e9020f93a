from enum import Enum


class ToDoCategory(Enum):
    CONSULT_REPORT = "consult_report"
    CARE_PLAN_INITIAL = "care_plan_initial"
    CHART_REVIEW = "chart_review"
    RETURN_CALL = "return_call"
    PATIENT_ENGAGEMENT = "patient_engagement"
    NEW_LEAD_FOLLOW_UP = "new_lead_follow_up"


class ToDoStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ToDoListType(Enum):
    PERSONAL = "personal"
    SHARED = "shared"
    DEPARTMENT = "department"


DEFAULT_LIST_COLOR = "#3b82f6"
