"""Prompt template for weekly study schedule generation"""
from langchain_core.prompts import ChatPromptTemplate


schedule_prompt_template = ChatPromptTemplate.from_messages([
    (
        "system",
        "You are a study planner. You build realistic weekly study schedules for students "
        "that respect their available time, balance subjects by weekly target hours, "
        "and put subjects with closer deadlines first."
    ),
    (
        "user",
        """Create a weekly study schedule.

Schedule period: {start_date} to {end_date}

Subjects:
{subjects_info}

Available hours: {available_hours}
Preferences: {preferences}
Other constraints: {constraints}

Guidelines:
- Return exactly 7 days, Monday to Sunday, in order
- Each session has a start time (HH:MM), subject, topic and type (study, review, practice or break)
- Match each subject's weekly hours as closely as possible
- total_hours is the sum of planned study hours
- Give 3-5 practical tips and the top priorities"""
    )
])
