ALL_MOVIES = "getAllMovies.php"
INSERT_MOVIE = "insertMovie.php"
GET_CART = "getMovieCart.php"
DELETE_MOVIE = "deleteMovie.php"
