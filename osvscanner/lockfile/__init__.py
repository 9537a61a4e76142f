"""Extractors that read package lists from Cargo, Composer, apk and dpkg files."""