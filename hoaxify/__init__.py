"""hoaxify - user registration service with transactional activation email."""
