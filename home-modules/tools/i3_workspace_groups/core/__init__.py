# Core encoding, allocation and operation logic for workspace groups
