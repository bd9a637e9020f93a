from django.urls import path

from workboard.views.analytics import AnalyticsView
from workboard.views.audit_log import AuditLogExportView, AuditLogListView
from workboard.views.auth import LogoutView, SessionView
from workboard.views.calendar import CalendarEventsView
from workboard.views.goal import GoalDetailView, GoalListView
from workboard.views.health import HealthView
from workboard.views.notification import NotificationDetailView, NotificationListView
from workboard.views.task import ClaimTaskView, TaskDetailView, TaskListView, UnclaimTaskView
from workboard.views.team import ReactivateMemberView, TeamMemberDetailView, TeamMemberListView, TerminateMemberView
from workboard.views.todo import (
    ToDoDetailView,
    ToDoItemDetailView,
    ToDoItemsView,
    ToDoListDetailView,
    ToDoListsView,
    ToDoListView,
)

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("auth/session", SessionView.as_view(), name="auth_session"),
    path("auth/logout", LogoutView.as_view(), name="auth_logout"),
    path("team", TeamMemberListView.as_view(), name="team"),
    path("team/<str:member_id>", TeamMemberDetailView.as_view(), name="team_member_detail"),
    path("team/<str:member_id>/terminate", TerminateMemberView.as_view(), name="terminate_team_member"),
    path("team/<str:member_id>/reactivate", ReactivateMemberView.as_view(), name="reactivate_team_member"),
    path("tasks", TaskListView.as_view(), name="tasks"),
    path("tasks/<str:task_id>", TaskDetailView.as_view(), name="task_detail"),
    path("tasks/<str:task_id>/claim", ClaimTaskView.as_view(), name="claim_task"),
    path("tasks/<str:task_id>/unclaim", UnclaimTaskView.as_view(), name="unclaim_task"),
    path("goals", GoalListView.as_view(), name="goals"),
    path("goals/<str:goal_id>", GoalDetailView.as_view(), name="goal_detail"),
    path("todos", ToDoListView.as_view(), name="todos"),
    path("todos/<str:todo_id>", ToDoDetailView.as_view(), name="todo_detail"),
    path("todo-lists", ToDoListsView.as_view(), name="todo_lists"),
    path("todo-lists/<str:list_id>", ToDoListDetailView.as_view(), name="todo_list_detail"),
    path("todo-lists/<str:list_id>/items", ToDoItemsView.as_view(), name="todo_items"),
    path("todo-lists/<str:list_id>/items/<str:item_id>", ToDoItemDetailView.as_view(), name="todo_item_detail"),
    path("calendar/events", CalendarEventsView.as_view(), name="calendar_events"),
    path("analytics", AnalyticsView.as_view(), name="analytics"),
    path("audit-logs", AuditLogListView.as_view(), name="audit_logs"),
    path("audit-logs/export", AuditLogExportView.as_view(), name="audit_logs_export"),
    path("notifications", NotificationListView.as_view(), name="notifications"),
    path("notifications/<str:notification_id>", NotificationDetailView.as_view(), name="notification_detail"),
]
