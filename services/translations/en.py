# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Step titles
    "access.step.business": "Business Information",
    "access.step.data_streams": "Data Streams",
    "access.step.data_sources": "Data Sources",
    "access.step.data_storages": "Data Storages",
    "access.step.audit": "Approval Information",

    # Page chrome
    "access.new_access": "New Access",
    "access.business_detail": "Business Detail {id}",

    # Footer
    "access.previous": "Previous",
    "access.next_step": "Next",
    "access.submit": "Submit",
    "access.back": "Back",

    # Notices
    "access.check_form_integrity": "Please check the integrity of the form",
    "access.submitted_successfully": "Submitted successfully",

    # Errors
    "error.api.connection": "Unable to reach the server. Please try again.",
    "error.api.timeout": "The server took too long to respond. Please try again.",
    "error.unexpected": "An unexpected error occurred.",
}
