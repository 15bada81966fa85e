"""Fixed catalog values for the institute."""

COURSES: list[str] = [
    "Python Full Stack Development",
    "Java Full Stack Development",
    "MERN Stack Development",
    "Data Science with Python",
    "Digital Marketing",
    "Custom Course",
]

DEFAULT_INSTITUTE_SETTINGS = {
    "institute_name": "Swamy Academy",
    "institute_address": "123 Education Lane, Knowledge City, India",
    "institute_contact": "Email: contact@swamyacademy.com | Phone: +91-9876543210",
    "logo_url": "https://picsum.photos/seed/swamyacademylogo/150/50",
    "signature_url": "https://picsum.photos/seed/swamyacademysig/150/50",
    "terms_and_conditions": (
        "1. Fees once paid are non-refundable.\n"
        "2. Course duration and content are subject to change.\n"
        "3. All disputes subject to local jurisdiction."
    ),
}

CSV_HEADERS = [
    "Invoice Number",
    "Name",
    "Email",
    "WhatsApp Number",
    "Address",
    "Course",
    "Amount Paid (INR)",
    "Pending Amount (INR)",
    "Date Added",
    "Status",
]
