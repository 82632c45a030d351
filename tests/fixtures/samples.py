"""
Sample serialized vCards used across the test suite.
"""

PHOTO_PAYLOAD = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

BASIC_VCARD = """BEGIN:VCARD
VERSION:3.0
FN:John Doe
N:Doe;John;;;
ORG:Example Corp
TITLE:Software Engineer
END:VCARD"""

CUSTOM_PROPERTIES_VCARD = """BEGIN:VCARD
VERSION:3.0
FN:Jane Smith
item1.X-ABLABEL:Mobile
item1.TEL;PREF=1;TYPE=CELL:+1-555-123-4567
item2.X-ABLABEL:Work Email
item2.EMAIL;CHARSET=UTF-8;TYPE=WORK:jane@example.com
item3.X-ABLABEL:LinkedIn
item3.URL;TYPE=HOME:https://linkedin.com/in/jane
END:VCARD"""

GAPPED_ITEMS_VCARD = """BEGIN:VCARD
VERSION:3.0
FN:Index Test
item1.X-ABLABEL:Phone
item1.TEL;PREF=1;TYPE=CELL:+1-555-123-4567
item3.X-ABLABEL:Email
item3.EMAIL;CHARSET=UTF-8;TYPE=WORK:test@example.com
END:VCARD"""

COMPLEX_VCARD = """BEGIN:VCARD
VERSION:3.0
FN:John Smith
N:Smith;John;;;
ORG:Tech Corp
TITLE:Senior Developer
NOTE:Experienced developer with 10+ years
item1.X-ABLABEL:Mobile
item1.TEL;PREF=1;TYPE=CELL:+1-555-123-4567
item2.X-ABLABEL:Work
item2.TEL;PREF=1;TYPE=WORK:+1-555-987-6543
item3.X-ABLABEL:Personal Email
item3.EMAIL;CHARSET=UTF-8;TYPE=HOME:john@personal.com
item4.X-ABLABEL:Work Email
item4.EMAIL;CHARSET=UTF-8;TYPE=WORK:john@techcorp.com
item5.X-ABLABEL:Portfolio
item5.URL;TYPE=HOME:https://johnsmith.dev
item6.X-ABLABEL:Home Address
item6.ADR;CHARSET=UTF-8:123 Oak Street;Springfield;IL;62701;USA
END:VCARD"""

PHOTO_VCARD = f"""BEGIN:VCARD
VERSION:3.0
FN:Photo User
PHOTO;ENCODING=BASE64;TYPE=JPEG:{PHOTO_PAYLOAD}
END:VCARD"""
