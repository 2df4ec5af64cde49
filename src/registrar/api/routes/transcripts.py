"""Transcript endpoints."""

from fastapi import APIRouter

from registrar.api.dependencies import EnrollmentServiceDep, StudentServiceDep
from registrar.api.models import APIResponse, TranscriptResponse, transcript_to_response
from registrar.records import Transcript

router = APIRouter(tags=["transcripts"])


@router.get("/students/{student_id}/transcript", response_model=APIResponse[TranscriptResponse])
def get_transcript(
    student_id: str, students: StudentServiceDep, enrollments: EnrollmentServiceDep
) -> APIResponse[TranscriptResponse]:
    """Generate a transcript for a student."""
    student = students.get_student(student_id)
    transcript = Transcript.create_from_student(
        student, enrollments.student_enrollments(student.student_id)
    )
    return APIResponse(data=transcript_to_response(transcript))
