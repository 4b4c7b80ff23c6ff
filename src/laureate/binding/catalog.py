#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

"""Known data fields, grouped by record section, for the field picker."""

from __future__ import annotations

from typing import Literal

from ..core.models import DataBinding, ValueType

Section = Literal["user", "course", "certificate", "institution", "signatories", "custom"]

SECTIONS: tuple[Section, ...] = (
    "user",
    "course",
    "certificate",
    "institution",
    "signatories",
    "custom",
)

_T = ValueType.TEXT
_N = ValueType.NUMBER
_D = ValueType.DATE
_I = ValueType.IMAGE

AVAILABLE_DATA_FIELDS: tuple[DataBinding, ...] = (
    DataBinding("user.fullName", "Full name", _T, required=True),
    DataBinding("user.firstName", "First name", _T),
    DataBinding("user.lastName", "Last name", _T),
    DataBinding("user.email", "Email", _T),
    DataBinding("user.studentId", "Student ID", _T),
    DataBinding("user.department", "Department", _T),
    DataBinding("user.faculty", "Faculty", _T),
    DataBinding("user.year", "Academic year", _N),
    DataBinding("user.gpa", "GPA", _N, format_pattern="0.00"),
    DataBinding("user.profileImage", "Profile photo", _I),
    DataBinding("course.name", "Course name", _T),
    DataBinding("course.code", "Course code", _T),
    DataBinding("course.instructor", "Instructor", _T),
    DataBinding("course.duration", "Duration", _T),
    DataBinding("course.credits", "Credits", _N),
    DataBinding("certificate.title", "Certificate title", _T, required=True),
    DataBinding("certificate.issueDate", "Issue date", _D, format_pattern="dd MMMM yyyy"),
    DataBinding("certificate.expiryDate", "Expiry date", _D, format_pattern="dd MMMM yyyy"),
    DataBinding("certificate.grade", "Grade", _T),
    DataBinding("certificate.score", "Score", _N),
    DataBinding("certificate.rank", "Rank", _N),
    DataBinding("certificate.totalParticipants", "Total participants", _N),
    DataBinding("certificate.verificationCode", "Verification code", _T, required=True),
    DataBinding("certificate.qrCode", "Verification QR code", ValueType.QR_CODE),
    DataBinding("institution.name", "Institution name", _T, required=True),
    DataBinding("institution.nameEn", "Institution name (English)", _T),
    DataBinding("institution.logo", "Institution logo", _I),
    DataBinding("institution.address", "Institution address", _T),
    DataBinding("signatories.0.name", "Signatory 1 name", _T),
    DataBinding("signatories.0.title", "Signatory 1 title", _T),
    DataBinding("signatories.0.signature", "Signatory 1 signature", _I),
    DataBinding("signatories.1.name", "Signatory 2 name", _T),
    DataBinding("signatories.1.title", "Signatory 2 title", _T),
    DataBinding("signatories.1.signature", "Signatory 2 signature", _I),
    DataBinding("customFields.honors", "Honors", _T),
    DataBinding("customFields.specialNote", "Special note", _T),
)

_SECTION_PREFIXES: dict[str, str] = {"custom": "customFields"}

SAMPLE_CERTIFICATE_DATA: dict[str, object] = {
    "user": {
        "id": "user-001",
        "firstName": "Jane",
        "lastName": "Doe",
        "fullName": "Jane Doe",
        "email": "jane.doe@university.example",
        "studentId": "65010001",
        "department": "Computer Science",
        "faculty": "Faculty of Science",
        "year": 2024,
        "gpa": 3.75,
    },
    "course": {
        "id": "course-001",
        "name": "Advanced Web Application Development",
        "code": "CS-401",
        "instructor": "Dr. Ada Lovelace",
        "duration": "16 weeks",
        "credits": 3,
    },
    "certificate": {
        "id": "cert-001",
        "title": "Certificate of Completion",
        "type": "completion",
        "issueDate": "2024-12-15",
        "grade": "A",
        "score": 95,
        "rank": 1,
        "totalParticipants": 45,
        "verificationCode": "CERT-2024-001-VERIFY",
        "qrCode": "https://verify.university.example/cert/cert-001",
    },
    "institution": {
        "name": "Future Technology University",
        "nameEn": "Future Technology University",
        "address": "123 Technology Road, Innovation District",
    },
    "signatories": [
        {"id": "sign-001", "name": "Prof. Grace Hopper", "title": "President"},
        {"id": "sign-002", "name": "Assoc. Prof. Alan Turing", "title": "Dean of Science"},
    ],
    "customFields": {
        "honors": "First Class Honors",
        "specialNote": "Outstanding achievement of 2024",
    },
}


def fields_by_section(section: str) -> tuple[DataBinding, ...]:
    normalized = section.strip().lower()
    if normalized not in SECTIONS:
        raise ValueError(f"unknown field section: {section}")
    prefix = _SECTION_PREFIXES.get(normalized, normalized) + "."
    return tuple(item for item in AVAILABLE_DATA_FIELDS if item.field_path.startswith(prefix))


def find_field(field_path: str) -> DataBinding | None:
    for item in AVAILABLE_DATA_FIELDS:
        if item.field_path == field_path:
            return item
    return None


def required_field_paths() -> tuple[str, ...]:
    return tuple(item.field_path for item in AVAILABLE_DATA_FIELDS if item.required)


__all__ = [
    "AVAILABLE_DATA_FIELDS",
    "SAMPLE_CERTIFICATE_DATA",
    "SECTIONS",
    "Section",
    "fields_by_section",
    "find_field",
    "required_field_paths",
]
