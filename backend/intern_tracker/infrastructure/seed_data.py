"""Seed Records — the starter document written when the data file does not exist.

Invariants:
    - Seed records satisfy every validation rule (unique ids and emails, valid enums)
    - Timestamps are fixed so a fresh install is reproducible
"""

SEED_CREATED_AT = "2024-01-10T09:00:00Z"


def build_seed_records() -> list[dict]:
    """Fresh list of seed records (callers may mutate it)."""
    return [
        {
            "id": "INT-001",
            "firstName": "Sarah",
            "lastName": "Johnson",
            "email": "sarah.johnson@company.com",
            "phone": "+1 (555) 123-4567",
            "department": "Engineering",
            "status": "Active",
            "startDate": "2024-01-15",
            "endDate": "2024-06-15",
            "university": "Stanford University",
            "gpa": 3.9,
            "skills": ["JavaScript", "React", "Node.js", "Python"],
            "projects": ["Customer Portal Redesign", "API Optimization"],
            "notes": "Excellent problem-solving skills and strong team player.",
            "createdAt": SEED_CREATED_AT,
            "statusChangedAt": "2024-01-15T09:00:00Z",
        },
        {
            "id": "INT-002",
            "firstName": "Michael",
            "lastName": "Chen",
            "email": "michael.chen@company.com",
            "phone": "+1 (555) 234-5678",
            "department": "Data Science",
            "status": "Pending",
            "startDate": "2024-02-01",
            "endDate": "2024-07-31",
            "university": "MIT",
            "gpa": 3.85,
            "skills": ["Python", "Machine Learning", "SQL"],
            "projects": [],
            "notes": "Strong background in statistics.",
            "createdAt": SEED_CREATED_AT,
            "statusChangedAt": SEED_CREATED_AT,
        },
        {
            "id": "INT-003",
            "firstName": "Emily",
            "lastName": "Rodriguez",
            "email": "emily.rodriguez@company.com",
            "phone": "+1 (555) 345-6789",
            "department": "Design",
            "status": "Completed",
            "startDate": "2023-09-01",
            "endDate": "2023-12-15",
            "university": "Rhode Island School of Design",
            "gpa": 3.7,
            "skills": ["Figma", "User Research", "Prototyping"],
            "projects": ["Mobile App Onboarding"],
            "notes": "Delivered the onboarding redesign ahead of schedule.",
            "createdAt": "2023-08-20T09:00:00Z",
            "statusChangedAt": "2023-12-15T17:00:00Z",
        },
        {
            "id": "INT-004",
            "firstName": "David",
            "lastName": "Kim",
            "email": "david.kim@company.com",
            "department": "Marketing",
            "status": "Pending",
            "university": "University of Michigan",
            "skills": ["Content Strategy", "SEO"],
            "createdAt": SEED_CREATED_AT,
            "statusChangedAt": SEED_CREATED_AT,
        },
        {
            "id": "INT-005",
            "firstName": "Priya",
            "lastName": "Patel",
            "email": "priya.patel@company.com",
            "phone": "+1 (555) 456-7890",
            "department": "Finance",
            "status": "Active",
            "startDate": "2024-03-01",
            "endDate": "2024-08-30",
            "university": "University of Pennsylvania",
            "gpa": 3.6,
            "skills": ["Excel", "Financial Modeling", "SQL"],
            "projects": ["Quarterly Forecast Automation"],
            "createdAt": "2024-02-15T09:00:00Z",
            "statusChangedAt": "2024-03-01T09:00:00Z",
        },
    ]
