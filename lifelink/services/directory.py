"""
Donor Directory

Read-only, credential-free view over the user store.
"""


class DonorDirectory:

    def __init__(self, users):
        self.users = users

    def search(self, blood_type=None, city=None):
        """Donor summaries matching the filters, newest first."""
        donors = self.users.list(blood_type=blood_type or None, city=city or None)
        return [donor.to_summary() for donor in donors]

    def get(self, donor_id):
        donor = self.users.find_by_id(donor_id)
        return donor.to_summary() if donor else None
