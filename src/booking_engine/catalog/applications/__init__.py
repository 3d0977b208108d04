from .lookup_offering import LookupOfferingService as LookupOfferingService
