from .submit_record import submit_record
